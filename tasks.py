from os import path
from shlex import quote

from invoke import task

ROOT = path.relpath(path.dirname(__file__))


def _pytest_args():
    # Doctests in the modules are supplemental examples, the real tests are
    # in uriref.test
    return ["--doctest-modules", "--pyargs", "uriref"]


@task
def test(ctx, combine_coverage=False):
    """Run uriref test suite"""
    cov_args = ["--parallel-mode"] if combine_coverage is True else []
    ctx.run(cmd(["coverage", "run"] + cov_args +
                ["-m", "pytest"] + _pytest_args()))

    if not combine_coverage:
        ctx.run("coverage report")


@task
def pep8(ctx):
    """Lint code for PEP 8 violations"""
    ctx.run("flake8 --version")
    ctx.run("flake8 --max-line-length 88 setup.py tasks.py uriref")


@task
def readme(ctx):
    """Run the examples in the README"""
    ctx.run(cmd("python", "-m", "doctest", path.join(ROOT, "README.rst")))


@task
def build_dists(ctx):
    """Build distribution packages"""
    ctx.run("python setup.py sdist", pty=True)
    ctx.run("python setup.py bdist_wheel", pty=True)


def cmd(*args):
    r"""
    Create a shell command string from a list of arguments.

    >>> print(cmd("a", "b", "c"))
    a b c
    >>> print(cmd(["ls", "-l", "some dir"]))
    ls -l 'some dir'
    >>> print(cmd(["echo", "I'm a \"string\"."]))
    echo 'I'"'"'m a "string".'
    """
    if len(args) == 1 and not isinstance(args[0], str):
        return cmd(*args[0])
    return " ".join(quote(arg) for arg in args)
