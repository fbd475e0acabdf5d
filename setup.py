"""
entityscope - query, flatten, export and cross-reference entity lumps

This setup.py file provides the package configuration for pip install and
pip install -e . during development.
"""

from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="entityscope",
        version="0.1.0",
        description="Filter, flatten, export and cross-reference structured entity records.",
        long_description=open("README.md", encoding="utf-8").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=find_packages(where="src", include=["entityscope", "entityscope.*"]),
        python_requires=">=3.11",
        install_requires=[
            "pydantic>=2.0",
            "PyYAML>=6.0",
            "prettytable>=3.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "entityscope=entityscope.cli.main:main",
            ],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries",
        ],
    )
