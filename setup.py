import os

from setuptools import setup, find_packages

with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "resreader", "version.py"),
    encoding="utf-8",
) as f:
    exec(f.read())

with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md"),
    encoding="utf-8",
) as r:
    README = r.read()

test_deps = ["pytest", "urllib3"]
extras = {
    "test": test_deps,
}

setup(
    name="resreader",
    # pylint: disable=undefined-variable
    version=__version__,  # type: ignore
    description="Decode, parse and reliably release HTTP response bodies",
    long_description=README,
    long_description_content_type="text/markdown",
    license="ISC",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Internet :: WWW/HTTP",
    ],
    install_requires=[
        "requests",
        "brotli",
        "ijson",
        "beautifulsoup4",
    ],
    tests_require=test_deps,
    extras_require=extras,
    include_package_data=True,
    packages=find_packages(include=["resreader"]),
    python_requires=">=3.8",
)
