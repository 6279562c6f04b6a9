import pathlib
from setuptools import setup

from cryptonum import __doc__ as docstring

setup(
    name="cryptonum",
    version="0.1",
    description=docstring.strip(),
    long_description=(pathlib.Path(__file__).parent / "README.rst").read_text(),
    long_description_content_type="text/x-rst",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.6",
    packages=[
        "cryptonum",
        "cryptonum.RSA",
    ],
    extras_require={
        'test': ['pytest'],
    },
)
