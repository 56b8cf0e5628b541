from setuptools import find_packages, setup

setup(
    name="editfilter",
    version="1.0.0",
    description="Pattern-constrained validator for in-place text edits",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["editfilter=editfilter.cli:main"]},
)
