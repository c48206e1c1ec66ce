# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


setup(
    name="nesguin",
    version="0.1.0",
    description="Instruction-level MOS 6502 CPU emulator",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["nesguin", "nesguin.*"]),
    python_requires=">=3.8",
    install_requires=[
        "more-itertools",
    ],
    extras_require={
        "test": ["parameterized", "pytest"],
    },
    entry_points={"console_scripts": []},
    scripts=["tools/runProgram.py"],
    classifiers=[
        "Environment :: Console",
        "Intended Audience :: Developers",
        'License :: OSI Approved :: MIT License',
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
