# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='setalgebra',
    version='0.1.0',
    description="Simplification and normal forms for expressions of set algebra",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=['tests']
    ),
    python_requires='>=3.11',
    install_requires=[
        'sympy',
        'typing_extensions'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD-2-Clause",
        "Operating System :: OS Independent",
    ],
)
