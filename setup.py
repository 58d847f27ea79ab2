from setuptools import setup, find_packages

setup(
    name="presetter",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "presetter.REGISTRY": [
            "catalog/*.yml",
            "catalog/presets/*.yml",
            "catalog/templates/*/*.yml",
        ],
    },
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "presetter=presetter.CLI.main:main",
        ],
    },
)
