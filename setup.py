from setuptools import setup, find_packages

setup(
    name="pycompdb",
    version="0.1.0",
    description="Generates compilation databases for multi workspace C/C++ projects",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["c", "c++", "compile_commands", "clangd"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "returns",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pycompdb = pycompdb.main:main",
        ]
    },
)
