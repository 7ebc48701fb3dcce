from setuptools import setup, find_packages

setup(
    name="disabler",
    version="0.1.0",
    packages=find_packages(exclude=["test", "test.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Disable and restore methods at runtime to guard test suites",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/zejia-lin/disabler",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
