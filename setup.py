"""Package metadata and dependency information."""

from setuptools import setup

setup(
    name="umaskscope",
    version="0.1.0",
    description="Temporarily override the process umask for a block of code",
    long_description="Scoped umask guard with helpers and a small CLI",
    author="Roman Zimmermann",
    author_email="torotil@gmail.com",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX",
        "Topic :: System :: Filesystems",
    ],
    keywords="umask permissions context-manager",
    packages=["umaskscope"],
    entry_points={
        "console_scripts": ["umaskscope = umaskscope.runner:main"],
    },
    include_package_data=True,
    extras_require={
        "yaml": ["ruamel.yaml"],
        "test": ["pytest", "ruamel.yaml"],
    },
)
