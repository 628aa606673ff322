import os

import mock
import pytest

from ephdev import linux


def test_block_devices(tmpdir):
    for name in ('xvda1', 'xvdb', 'loop0'):
        os.mkdir(os.path.join(str(tmpdir), name))
    assert linux.block_devices(str(tmpdir)) == set(['xvda1', 'xvdb', 'loop0'])


@mock.patch('os.listdir', return_value=['sda', 'sdb'])
def test_block_devices_default_path(listdir):
    assert linux.block_devices() == set(['sda', 'sdb'])
    listdir.assert_called_once_with('/sys/block')


def test_block_devices_missing_dir(tmpdir):
    with pytest.raises(linux.LinuxError):
        linux.block_devices(os.path.join(str(tmpdir), 'missing'))
