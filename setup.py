from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "typing-extensions>=4.4.0",
    "cairosvg>=2.5.2",
    "pillow>=9.3.0"
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0"
]

setup(
    name="svg_scene",
    version="0.3.0",
    description="Build 2-D vector scenes in memory and serialize them to standalone SVG documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-scene=svg_scene.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Multimedia :: Graphics",
    ],
)
