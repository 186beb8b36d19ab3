import io

from setuptools import setup


def file_contents(path):
    with io.open(path, encoding="utf-8") as f:
        return f.read()


def file_lines(path):
    return [line for line in file_contents(path).split("\n")
            if line.strip()]


setup(
    name="uriref",
    description="Parse, resolve and percent-encode URI references (RFC 3986)",
    long_description=file_contents("README.rst"),
    version="0.1.0",
    packages=["uriref", "uriref.test"],
    python_requires=">=3.8",
    install_requires=file_lines("requirements/install.txt"),
    extras_require={
        "tests": file_lines("requirements/test.txt"),
        "dev": file_lines("requirements/dev.txt"),
    },
    entry_points={
        "console_scripts": [
            "uriref = uriref.cmdline:main"
        ]
    },
    include_package_data=True,
    license='Apache 2.0',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Internet",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="uri url rfc3986 resolve percent-encoding"
)
