from setuptools import setup, find_packages

setup(
    name="bitmap_core",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"bitmap_core": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
