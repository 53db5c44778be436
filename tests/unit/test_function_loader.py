"""
Unit tests for FunctionLoader
"""

import os

import pytest

from mapreduce_engine.errors import ItemError, JobFileError
from mapreduce_engine.function_loader import FunctionLoader


class TestFunctionLoaderBasics:
    """Tests for basic loading functionality"""

    def test_loads_valid_job_file(self, wordcount_job_file):
        loader = FunctionLoader(wordcount_job_file)
        module = loader.load_module()

        assert module is not None
        assert hasattr(module, 'map_fn')
        assert hasattr(module, 'reduce_fn')

    def test_raises_error_for_nonexistent_file(self):
        loader = FunctionLoader('/nonexistent/file.py')

        with pytest.raises(FileNotFoundError):
            loader.load_module()

    def test_get_map_function_loads_module_automatically(self, wordcount_job_file):
        loader = FunctionLoader(wordcount_job_file)
        map_fn = loader.get_map_function()

        assert callable(map_fn)
        assert loader.module is not None

    def test_missing_reduce_fn(self, incomplete_job_file):
        loader = FunctionLoader(incomplete_job_file)

        assert callable(loader.get_map_function())
        with pytest.raises(JobFileError, match="reduce_fn"):
            loader.get_reduce_function()

    def test_import_error_in_job_file(self, temp_dir):
        job_file = os.path.join(temp_dir, 'needs_missing_dep.py')
        with open(job_file, 'w') as f:
            f.write("import does_not_exist_xyz\n")
        loader = FunctionLoader(job_file)

        with pytest.raises(JobFileError, match="does_not_exist_xyz") as excinfo:
            loader.load_module()

        assert isinstance(excinfo.value.__cause__, ModuleNotFoundError)
        assert loader.module is None

    def test_job_file_raising_at_import(self, temp_dir):
        job_file = os.path.join(temp_dir, 'raises.py')
        with open(job_file, 'w') as f:
            f.write("raise RuntimeError('not configured')\n")

        with pytest.raises(JobFileError, match="RuntimeError: not configured"):
            FunctionLoader(job_file).get_map_function()


class TestExampleJobs:
    """The shipped example job files behave as documented"""

    def test_wordcount_map_strips_punctuation(self, wordcount_job_file):
        map_fn = FunctionLoader(wordcount_job_file).get_map_function()

        assert map_fn("Hello,") == ("hello", 1)

    def test_wordcount_reduce_prints_total(self, wordcount_job_file, capsys):
        reduce_fn = FunctionLoader(wordcount_job_file).get_reduce_function()

        reduce_fn("fox", [1, 1, 1])

        assert capsys.readouterr().out == "fox\t3\n"

    def test_parity_map(self, parity_job_file):
        map_fn = FunctionLoader(parity_job_file).get_map_function()

        assert map_fn("4") == (True, 4)
        assert map_fn("-3") == (False, -3)

    def test_parity_map_rejects_non_integers(self, parity_job_file):
        map_fn = FunctionLoader(parity_job_file).get_map_function()

        rejected = map_fn("four")

        assert isinstance(rejected, ItemError)
        assert rejected.item == "four"

    def test_parity_reduce_prints_sum(self, parity_job_file, capsys):
        reduce_fn = FunctionLoader(parity_job_file).get_reduce_function()

        reduce_fn(True, [2, 4])

        assert capsys.readouterr().out == "True: 6\n"
