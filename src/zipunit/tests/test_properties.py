"""
属性测试（构建后断言必然成立）
"""

import tempfile

import pytest
from hypothesis import given, settings, strategies as st

from zipunit import (
    ZipBuilder,
    assert_directory_exists,
    assert_entry,
    assert_entry_actual_size,
    assert_entry_does_not_exist,
    assert_number_of_entries_is,
)

file_names = st.from_regex(r"[a-z0-9_]{1,8}(/[a-z0-9_]{1,8})?\.(txt|bin)", fullmatch=True)
dir_names = st.from_regex(r"[a-z0-9_]{1,8}(/[a-z0-9_]{1,8})?", fullmatch=True)


@settings(max_examples=30, deadline=None)
@given(
    st.dictionaries(file_names, st.binary(max_size=512) | st.text(max_size=128), max_size=10),
    st.sets(dir_names, max_size=5),
    st.booleans(),
)
def test_built_entries_are_asserted(files, dirs, trailing_slash):
    """
    *For any* 条目集合，构建后的 zip 应满足 assert_entry / assert_entry_actual_size /
    assert_directory_exists / assert_number_of_entries_is
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        builder = ZipBuilder(tmpdir)
        for name, content in files.items():
            builder.with_entry(name, content)
        for name in dirs:
            builder.with_dir_entry(name + "/" if trailing_slash else name)
        path = builder.build()

        for name, content in files.items():
            assert_entry(path, name, content)
            expected = content.encode("utf-8") if isinstance(content, str) else content
            assert_entry_actual_size(path, name, len(expected))
        for name in dirs:
            assert_directory_exists(path, name)
            assert_directory_exists(path, name + "/")
        assert_number_of_entries_is(path, len(files) + len(dirs))


@settings(max_examples=20, deadline=None)
@given(st.sets(file_names, min_size=1, max_size=10), file_names)
def test_entry_does_not_exist_only_for_absent_names(names, candidate):
    with tempfile.TemporaryDirectory() as tmpdir:
        builder = ZipBuilder(tmpdir)
        for name in names:
            builder.with_entry(name, name)
        path = builder.build()

        if candidate in names:
            with pytest.raises(AssertionError):
                assert_entry_does_not_exist(path, candidate)
        else:
            assert_entry_does_not_exist(path, candidate)
