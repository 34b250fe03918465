from herlang.diagnostics import check_indentation

WELL_FORMED = (
    "function greet name:\n"
    "    say \"hi\" name\n"
    "end\n"
    "\n"
    "# entry point\n"
    "start:\n"
    "    greet \"x\"\n"
    "end\n"
)


def test_well_formed_source_has_no_warnings(capsys):
    assert check_indentation(WELL_FORMED) == []
    assert capsys.readouterr().err == ""


def test_end_without_block(capsys):
    warnings = check_indentation("end\n")
    assert len(warnings) == 1
    assert "'end' without matching block start." in warnings[0]
    assert "Line 1" in warnings[0]


def test_end_indentation_mismatch():
    warnings = check_indentation("start:\n    say\n  end\n")
    assert len(warnings) == 1
    assert "'end' indentation mismatch" in warnings[0]
    assert "got 2" in warnings[0]


def test_inconsistent_body_indentation():
    warnings = check_indentation("start:\nsay\nend\n")
    assert len(warnings) == 1
    assert "Inconsistent indentation" in warnings[0]
    assert "Line 2" in warnings[0]


def test_missing_end_reported_at_eof():
    warnings = check_indentation("start:\n    say\n")
    assert warnings == [
        "[Warning] EOF: Some blocks not closed properly (missing 'end')."
    ]


def test_blank_and_comment_lines_still_count():
    warnings = check_indentation("\n# note\nend\n")
    assert "Line 3" in warnings[0]


def test_tabs_do_not_count_as_indentation():
    warnings = check_indentation("start:\n\tsay\nend\n")
    assert len(warnings) == 1
    assert "got 0" in warnings[0]


def test_nested_blocks_balance():
    source = "start:\n    if x:\n        say\n    end\nend\n"
    assert check_indentation(source) == []


def test_warnings_are_written_to_stderr(capsys):
    warnings = check_indentation("end\nstart:\n")
    err = capsys.readouterr().err
    assert err == "".join(message + "\n" for message in warnings)
    assert len(warnings) == 2