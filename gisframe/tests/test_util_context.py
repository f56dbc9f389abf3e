import os

import pytest

from gisframe.util import cd


def test_cd(tmp_path):
    before = os.getcwd()
    with cd(tmp_path):
        assert os.path.samefile(os.getcwd(), tmp_path)
    assert os.getcwd() == before


def test_cd_restores_after_error(tmp_path):
    before = os.getcwd()
    with pytest.raises(RuntimeError):
        with cd(tmp_path):
            raise RuntimeError("fail")
    assert os.getcwd() == before
