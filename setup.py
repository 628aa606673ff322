import os
from setuptools import setup, find_packages


def make_data_files(dst, src):
    ret = []
    for directory, _, files in os.walk(src):
        if not directory.startswith("."):
            ret.append([
                    directory.replace(src, dst),
                    list(os.path.join(directory, f) for f in files)
            ])
    return ret

description = "Detects ephemeral block devices of a cloud server and maps them to guest device names"

data_files = make_data_files('/etc/ephdev', 'etc')


cfg = dict(
        name = "ephdev",
        version = open('src/ephdev/version').read().strip(),
        description = description,
        long_description = description,
        license = "GPL",
        platforms = "any",
        package_dir = {"" : "src"},
        packages = find_packages("src"),
        package_data = {"ephdev": ["version"]},
        include_package_data = True,
        python_requires = ">=3.9",
        install_requires = ["docopt", "PyYAML"],
        extras_require = {
            "test": ["pytest", "mock"]
        },
        data_files = data_files,
        entry_points = {
            'console_scripts': [
                'ephdev = ephdev.app:main'
            ]
        }
)
setup(**cfg)
