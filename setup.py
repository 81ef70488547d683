from setuptools import setup, find_packages

setup(
    name="spheretrace",
    version="1.0.0",
    description="Recursive ray tracer for mirrored spheres with multi-resolution supersampling",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "opencv-python>=4.5.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "spheretrace=spheretrace.main:main",
        ],
    },
    python_requires=">=3.8",
)
