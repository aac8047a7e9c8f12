"""
Pytest configuration for Scrypt tests.
"""
import io
import sys
import os

import pytest

# Ensure `import scryptlang...` works without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def run_program():
	"""Run source text and return everything it printed."""
	from scryptlang import run

	def _run(source):
		out = io.StringIO()
		run(source, output=out)
		return out.getvalue()

	return _run
