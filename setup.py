from setuptools import setup, find_packages

setup(
    name="cellgrid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"cellgrid": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_inspect=tools.grid_inspect:main",
        ]
    },
)
