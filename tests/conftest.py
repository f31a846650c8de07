import importlib.util
import os
import pytest

import unitpromise


examples = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'examples')


def load_example(name):
    """ The example promise types are not part of the installed package;
        load them straight from their files.
    """

    path = os.path.join(examples, name + '.py')
    spec = importlib.util.spec_from_file_location('example_' + name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def recorder():
    return unitpromise.Recorder()


@pytest.fixture
def session(recorder):
    return unitpromise.Session(recorder)


@pytest.fixture(scope="session")
def directory_module():
    return load_example('directory')


@pytest.fixture(scope="session")
def git_module():
    return load_example('git')

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
