"""
Dynamic Function Loader for job files
Loads user-provided Python modules defining map_fn and reduce_fn
"""

import importlib.util
import os

from mapreduce_engine.errors import JobFileError


class FunctionLoader:
    """Dynamically loads user-provided map/reduce functions from Python files"""

    def __init__(self, job_file: str):
        """
        Initialize the function loader

        Args:
            job_file: Path to user's Python file containing map_fn and reduce_fn
        """
        self.job_file = job_file
        self.module = None

    def load_module(self):
        """
        Dynamically load user-provided module

        Returns:
            The loaded module object

        Raises:
            FileNotFoundError: If the job file doesn't exist
            JobFileError: If the file can't be imported or raises while importing
        """
        if not os.path.exists(self.job_file):
            raise FileNotFoundError(f"Job file not found: {self.job_file}")

        module_name = f"job_{os.path.splitext(os.path.basename(self.job_file))[0]}"
        spec = importlib.util.spec_from_file_location(module_name, self.job_file)
        if spec is None or spec.loader is None:
            raise JobFileError(f"Failed to load job file: {self.job_file}")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise JobFileError(f"Failed to import job file {self.job_file}: "
                               f"{type(e).__name__}: {e}") from e
        self.module = module
        return module

    def _get(self, name: str):
        if not self.module:
            self.load_module()

        func = getattr(self.module, name, None)
        if not callable(func):
            raise JobFileError(f"Job file must define '{name}': {self.job_file}")
        return func

    def get_map_function(self):
        """Get map_fn from the loaded module, loading it if needed"""
        return self._get('map_fn')

    def get_reduce_function(self):
        """Get reduce_fn from the loaded module, loading it if needed"""
        return self._get('reduce_fn')
