from pathlib import Path

import pytest

from cargo_index.core.config_loader import find_config_file


@pytest.fixture
def isolated_tmp_path(tmp_path: Path) -> Path:
    """tmp_path whose ancestors carry no .cargo config of their own.

    Config discovery walks up to the filesystem root, so a stray config above
    the pytest temp directory would be merged into every resolution.
    """
    for ancestor in tmp_path.parents:
        stray = find_config_file(ancestor / ".cargo")
        if stray is not None:
            pytest.skip(f"Cargo config above the test directory: {stray}")
    return tmp_path
