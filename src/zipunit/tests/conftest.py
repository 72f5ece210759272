import pytest

from zipunit.pytest_plugin import zip_builder, zip_folder  # noqa: F401


@pytest.fixture
def sample_builder(zip_builder):
    """1.txt / 2.bin / dir/ 三个条目"""
    return (
        zip_builder
        .with_entry("1.txt", "content")
        .with_entry("2.bin", bytes([1, 2, 3]))
        .with_dir_entry("dir/")
    )


@pytest.fixture
def sample_zip(sample_builder):
    return sample_builder.build()
