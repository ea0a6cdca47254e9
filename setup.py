import re
from setuptools import setup, find_packages

with open("./README.md", "r") as f:
    description = f.read()

with open("./requirements.txt", 'r') as f:
    requirements = f.read().split()

with open("./ringcube/__init__.py", "r") as f:
    metadata = dict(re.findall(r'^__(\w+)__ = "([^"]*)"', f.read(), re.MULTILINE))

setup(
    name="ringcube",
    version=metadata["version"],
    author=metadata["author"],
    author_email='singhvi.vivaan@gmail.com',
    description="Immutable model of a 3x3 cube and its quarter turns",
    long_description=description,
    long_description_content_type="text/markdown",
    license='MIT',
    packages=find_packages(exclude=["tests"]),
    python_requires='>=3.10',
    include_package_data=True,
    install_requires=requirements,
    extras_require={"test": ["pytest"]}
)
