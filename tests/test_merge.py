import pytest

from mudkit.merge import MergeError, main, merge

NEW = ["#10\n", "new ten\n", "~\n", "#30\n", "new thirty\n", "~\n", "#99999\n", "$~\n"]
OLD = ["#20\n", "old twenty\n", "~\n", "#30\n", "old thirty\n", "~\n", "#99999\n", "$~\n"]
EXPECTED = [
    "#10\n", "new ten\n", "~\n",
    "#20\n", "old twenty\n", "~\n",
    "#30\n", "new thirty\n", "~\n",
    "#99999\n", "$~\n",
]


def test_merge_interleaves_and_replaces():
    assert list(merge(NEW, OLD)) == EXPECTED


def test_replaced_record_is_dropped():
    merged = list(merge(NEW, OLD))
    assert "old thirty\n" not in merged
    assert merged.count("#30\n") == 1


def test_header_whitespace_is_accepted_and_normalised():
    new = ["  # 5\n", "a\n", "#99999\n", "$~\n"]
    old = ["#99999\n", "$~\n"]
    assert list(merge(new, old)) == ["#5\n", "a\n", "#99999\n", "$~\n"]


def test_missing_header_raises():
    with pytest.raises(MergeError):
        list(merge(["no header\n"], OLD))
    with pytest.raises(MergeError):
        list(merge(NEW, []))


def test_unterminated_record_raises():
    with pytest.raises(MergeError):
        list(merge(["#10\n", "body\n"], OLD))


def test_main_writes_merged_output(tmp_path, capsys):
    new_file = tmp_path / "new.wld"
    old_file = tmp_path / "old.wld"
    new_file.write_text("".join(NEW))
    old_file.write_text("".join(OLD))
    assert main([str(new_file), str(old_file)]) == 0
    assert capsys.readouterr().out == "".join(EXPECTED)


def test_main_usage(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    old_file = tmp_path / "old.wld"
    old_file.write_text("".join(OLD))
    assert main([str(tmp_path / "absent"), str(old_file)]) == 1
    assert "Could not open the builders file." in capsys.readouterr().out