import setuptools

with open("README.md", "r") as fd:
    long_description = fd.read()

with open("VERSION", "r") as fd:
    version = fd.read().strip()

setuptools.setup(
    name="greibach",
    version=version,
    description="Context-free grammars simplification and Greibach normal form.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.7",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Compilers",
    ],
)
