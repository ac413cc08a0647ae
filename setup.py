# -----------------------------------------------------------------------------
# MIT License
#
# Copyright (c) 2024 rdfvocab Team
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# -----------------------------------------------------------------------------

"""
# Min version                  : pip3 install -e .
# Full version (with tests)    : pip3 install -e .["full"]
# Document version             : pip3 install -e .["doc"]
"""

from setuptools import setup, find_packages
import re

with open('README.md', 'r') as fh:
    long_description = fh.read()
_deps = [
    "rdflib>=6.0.2",
    "pytest>=7.2.2",
    "sphinx>=7.2.6",
    "sphinx-autoapi>=3.0.0",
    "sphinx_rtd_theme>=2.0.0",
    "myst-parser>=2.0.0",
    "flake8>=6.0.0"]

deps = {b: a for a, b in (re.findall(r"^(([^!=<>~ ]+)(?:[!=<>~ ].*)?$)", x)[0] for x in _deps)}


def deps_list(*pkgs):
    return [deps[pkg] for pkg in pkgs]


extras = dict()
extras["min"] = deps_list("rdflib")

extras["doc"] = (deps_list("sphinx",
                           "sphinx-autoapi",
                           "sphinx_rtd_theme",
                           "myst-parser"))

extras["test"] = deps_list("pytest", "flake8")

extras["full"] = (extras["min"] + extras["test"])

setup(
    name="rdfvocab",
    description="rdfvocab models RDFS and OWL vocabularies as interned, attribute-carrying terms under lenient or "
                "strict namespaces, and expands term definitions into RDF statements.",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"rdfvocab": ["logging.conf"]},
    install_requires=extras["min"],
    extras_require=extras,
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries"],
    python_requires='>=3.10',
    long_description=long_description,
    long_description_content_type="text/markdown",
)
