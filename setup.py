import glob
import os
from os import path
import platform
import re

from setuptools import find_packages
from setuptools import setup

try:
    from Cython.Build import build_ext as _cy_build_ext
    from Cython.Distutils.extension import Extension as _cy_Extension

    HAS_CYTHON = True
except ImportError:
    _cy_build_ext = _cy_Extension = None
    HAS_CYTHON = False

DISABLE_EXTENSION = bool(os.environ.get('URIKIT_DISABLE_CYTHON'))
IS_CPYTHON = platform.python_implementation() == 'CPython'

MYDIR = path.abspath(os.path.dirname(__file__))


def get_version():
    with open(path.join(MYDIR, 'urikit', 'version.py')) as version_file:
        match = re.search(r"__version__ = '([^']+)'", version_file.read())

    assert match is not None
    return match.group(1)


if HAS_CYTHON and IS_CPYTHON and not DISABLE_EXTENSION:
    assert _cy_Extension is not None
    assert _cy_build_ext is not None

    def list_modules(dirname, pattern):
        filenames = glob.glob(path.join(dirname, pattern))

        module_names = []
        for name in filenames:
            module, ext = path.splitext(path.basename(name))
            if module != '__init__':
                module_names.append((module, ext))

        return module_names

    package_names = [
        'urikit',
        'urikit.util',
    ]

    # NOTE: Dataclasses and enums are left to the interpreter.
    modules_to_exclude = [
        'urikit.constants',
        'urikit.parts',
        'urikit.version',
    ]

    cython_directives = {'language_level': '3', 'annotation_typing': False}

    ext_modules = [
        _cy_Extension(
            package + '.' + module,
            sources=[path.join(*(package.split('.') + [module + ext]))],
            cython_directives=cython_directives,
            optional=True,
        )
        for package in package_names
        for module, ext in list_modules(
            path.join(MYDIR, *package.split('.')), '*.py'
        )
        if (package + '.' + module) not in modules_to_exclude
    ]

    cmdclass = {'build_ext': _cy_build_ext}
else:
    ext_modules = []
    cmdclass = {}


setup(
    name='urikit',
    version=get_version(),
    description=(
        'Parse http(s) and data URIs into immutable records; '
        'percent-encoding and Base64 helpers.'
    ),
    license='Apache-2.0',
    packages=find_packages(include=['urikit', 'urikit.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'cython': ['cython'],
        'test': ['pytest'],
    },
    classifiers=[
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
    ],
    cmdclass=cmdclass,
    ext_modules=ext_modules,
)
