import configargparse
import os
import contextlib
import shutil
import tempfile
import textwrap
import whenpresent.directives
import whenpresent.wrappedos

# The abbreviation "uth" is often used for this "unittesthelper"


def reset():
    delete_existing_parsers()
    whenpresent.wrappedos.clear_cache()


def delete_existing_parsers():
    """The singleton parsers supplied by configargparse
    don't play well with the unittest framework.
    This function will delete them so you are
    starting with a clean slate
    """
    configargparse._parsers = {}


def pkgdir():
    return os.path.dirname(os.path.realpath(__file__))


def samplesdir():
    return os.path.realpath(os.path.join(pkgdir(), "samples"))


def sample_lines(relativepath):
    """The physical lines of one of the sample sources"""
    return list(whenpresent.directives.read_lines(os.path.join(samplesdir(), relativepath)))


def source_lines(text):
    """Split some (usually triple quoted) test source into physical lines"""
    return textwrap.dedent(text).strip("\n").split("\n")


def create_temp_config(tempdir=None, filename=None, extralines=[]):
    """User is responsible for removing the config file when
    they are finished
    """
    if not filename:
        tf_handle, filename = tempfile.mkstemp(suffix=".conf", text=True, dir=tempdir)
        os.close(tf_handle)
    elif tempdir:
        filename = os.path.join(tempdir, filename)

    with open(filename, "w") as ff:
        for line in extralines:
            ff.write(line + "\n")

    return filename


class TempDirContext:
    """Context manager that creates a temporary directory and changes into it"""

    def __init__(self):
        self.tmpdir = None
        self._origdir = None

    def __enter__(self):
        self._origdir = os.getcwd()
        self.tmpdir = tempfile.mkdtemp()
        os.chdir(self.tmpdir)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        os.chdir(self._origdir)
        shutil.rmtree(self.tmpdir, ignore_errors=True)


@contextlib.contextmanager
def EnvironmentContext(env_vars):
    """Context manager for temporarily setting environment variables.

    Args:
        env_vars: Dictionary of environment variables to set
    """
    original_values = {}

    for key, value in env_vars.items():
        original_values[key] = os.getenv(key)
        os.environ[key] = value

    try:
        yield
    finally:
        for key, value in original_values.items():
            if value is not None:
                os.environ[key] = value
            else:
                os.environ.pop(key, None)
