from setuptools import find_namespace_packages, setup

setup(
    name="music_tree_etl",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", exclude=["music_tree_etl_tests*"]),
    install_requires=[
        "dagster",
        "dagster-cloud",
        "polars>=1.0",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={"dev": ["dagster-webserver", "pytest"]},
)
