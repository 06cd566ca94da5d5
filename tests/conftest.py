import io

import pytest

from minforth import InteractiveForth


def make_forth(stdin='', **options):
    return InteractiveForth(output=io.StringIO(), input=io.StringIO(stdin), **options)


@pytest.fixture
def forth():
    return make_forth()


@pytest.fixture
def run():
    """Run source on a fresh interpreter, return (printed text, final stack)"""
    def _run(source, stdin='', **options):
        f = make_forth(stdin, **options)
        f.execute(source)
        return f.output.getvalue(), f.stack
    return _run
