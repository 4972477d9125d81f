import os
import re
import types
import typing

import setuptools

MAIN_MODULE_NAME = "kura"
TARGET_PROJECT_NAME = "hikari-kura"


def load_meta_data():
    pattern = re.compile(r"__(?P<key>\w+)__\s=\s\"(?P<value>.+)\"")
    with open(os.path.join(MAIN_MODULE_NAME, "about.py"), "r") as file:
        code = file.read()

    groups = dict(group.groups() for group in pattern.finditer(code))
    return types.SimpleNamespace(**groups)


def load_requirements(path: str) -> typing.List[str]:
    with open(path) as file:
        return [line.strip() for line in file if line.strip() and not line.startswith("#")]


metadata = load_meta_data()

requires: typing.List[str] = []
dependency_links: typing.List[str] = []
for line in load_requirements("requirements.txt"):
    if line.startswith("git+"):
        dependency_links.append(line[4:])

    else:
        requires.append(line)


with open("README.md") as f:
    README = f.read()


setuptools.setup(
    name=TARGET_PROJECT_NAME,
    version=metadata.version,
    packages=setuptools.find_namespace_packages(include=[f"{MAIN_MODULE_NAME}*"]),
    author=metadata.author,
    license=metadata.license,
    description="A denormalized Redis read cache for Hikari guild and voice state data.",
    long_description=README,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=requires,
    extras_require={"tests": load_requirements("tests-requirements.txt")},
    dependency_links=dependency_links,
    python_requires=">=3.9.0",
    classifiers=[
        "Development Status :: 1 - Planning",
        "License :: OSI Approved :: BSD License",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Communications :: Chat",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
)
