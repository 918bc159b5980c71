from setuptools import find_packages, setup


VALID_PY_VERSIONS = [
    f"Programming Language :: Python :: 3.{v}" for v in range(9, 13)
]

setup(
    name="typed_args",
    version="0.1.0",
    description="bind short command line options to annotated class fields",
    long_description=open("README.md", "r").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    extras_require={"test": ["pytest"]},
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        *VALID_PY_VERSIONS,
    ],
    python_requires=">=3.9",
)
