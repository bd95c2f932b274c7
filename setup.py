from setuptools import setup, find_packages

setup(
    name='spchart',
    version='0.1.0',
    packages=find_packages(where='src', include=["spchart", "spchart.*"]),
    package_dir={'': 'src'},
    install_requires=[
        "numpy",
        "loguru",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
)
