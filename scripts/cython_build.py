from pathlib import Path

from Cython.Build import cythonize
from Cython.Compiler import Options
from setuptools import Extension, setup

from authcode.config import load_settings

CYTHON_MARCH = 'native'
CYTHON_MTUNE = 'native'
CYTHON_FLAGS = ''

load_settings(__name__, globals())

Options.docstrings = False
Options.annotate = True

# build in place with: python scripts/cython_build.py build_ext --inplace
dirs = ('authcode/lib',)

paths = [p for dir_ in dirs for p in Path(dir_).rglob('*.py')]

extra_args: list[str] = [
    '-O3',
    '-pipe',
    f'-march={CYTHON_MARCH}',
    f'-mtune={CYTHON_MTUNE}',
    '-fhardened',
    '-fno-semantic-interposition',
    '-fvisibility=hidden',
    *CYTHON_FLAGS.split(),
]

setup(
    ext_modules=cythonize(
        [
            Extension(
                path.with_suffix('').as_posix().replace('/', '.'),
                [str(path)],
                extra_compile_args=extra_args,
                extra_link_args=extra_args,
            )
            for path in paths
        ],
        compiler_directives={
            # https://cython.readthedocs.io/en/latest/src/userguide/source_files_and_compilation.html#compiler-directives
            'overflowcheck': True,
            'embedsignature': True,
            'language_level': 3,
        },
    ),
)
