from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="presorted-collections",
    version="1.0.0",
    description="Lists kept sorted by key which combine elements sharing a key instead of duplicating them.",
    packages=["presorted", "presorted._src"],
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
