import runpy

from setuptools import find_packages, setup


def load_version(filename):
    return runpy.run_path(filename)["VERSION"]


def load_text(filename):
    with open(filename) as fd:
        return fd.read()


def load_requirements(filename):
    return load_text(filename).splitlines()


requirements = load_requirements("requirements.txt")
test_requirements = load_requirements("requirements-dev.txt")

setup(
    name="pkgchangelog",
    description="Render a YAML changelog as debian or rpm changelog",
    long_description=load_text("README.md"),
    long_description_content_type="text/markdown",
    version=load_version("pkgchangelog/version.py"),
    packages=find_packages(exclude=("tests", "tests*")),
    entry_points={"console_scripts": ["pkgchangelog = pkgchangelog.cli:safe_cli"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Build Tools",
    ],
    extras_require={"test": test_requirements},
    install_requires=requirements,
    python_requires=">=3.8",
)
