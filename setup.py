#!/usr/bin/env python
import os

from setuptools import find_packages, setup

# Get version info
__version__ = None
__release__ = None
exec(open("tagsmith/version.py").read())


def content_of(*files):
    here = os.path.abspath(os.path.dirname(__file__))
    content = []
    for f in files:
        with open(os.path.join(here, f), encoding="utf-8") as stream:
            content.append(stream.read())
    return "\n".join(content)


setup(
    name="tagsmith",
    version=__release__,
    description="HTML markup serializer with HTML5, HTML 4.01 and XHTML output profiles",
    long_description=content_of("README.rst", "CHANGES.rst"),
    long_description_content_type="text/x-rst",
    classifiers=[  # http://pypi.python.org/pypi?:action=list_classifiers
        "Development Status :: 4 - Beta",
        "Environment :: Web Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Text Processing :: Markup :: XML",
    ],
    keywords="html xhtml html5 markup serializer escape doctype",
    license="MIT",
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    zip_safe=False,
    install_requires=[],
    python_requires=">=3.8",
    extras_require={
        "testing": ["pytest"],
    },
    entry_points="""
        [console_scripts]
        tagsmith = tagsmith.__main__:main
    """,
)
