from setuptools import setup, find_packages
from os import path
from io import open

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="minauto",
    version="0.1",
    packages=find_packages(exclude=["testing", "testing.*"]),
    include_package_data=True,
    package_data={"minauto": ["builtin/*.dfa"]},

    install_requires=[
        "numpy>=1.22",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["minauto=minauto.__main__:main"],
    },

    python_requires=">=3.9",

    license="MIT",
    description="""Minimization of deterministic finite automata by
    partition refinement, with dead state detection""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
