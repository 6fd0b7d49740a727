from setuptools import setup, find_packages

setup(
    name="sphere-grid",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),  # sphere_grid and grid_ffi
    include_package_data=True,
    package_data={"sphere_grid": ["constants.json"]},
    install_requires=[
        "numpy>=1.24",
        "python-dotenv>=1.1.1",
    ],
    extras_require={
        "dev": ["pytest"],  # for testing
    },
)
