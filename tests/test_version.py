from golings.version import build_version


def test_full_version_lines():
    lines = build_version("1.0", "abc", "today").splitlines()
    assert lines[:3] == ["1.0", "commit: abc", "built at: today"]
    assert lines[3].startswith("goos: ")
    assert lines[4].startswith("goarch: ")
    assert len(lines) == 5


def test_empty_commit_and_date_are_omitted():
    lines = build_version("dev", "", "").splitlines()
    assert lines[0] == "dev"
    assert len(lines) == 3
    assert not any(line.startswith(("commit:", "built at:")) for line in lines)


def test_platform_lines_are_stable():
    first = build_version("a", "", "").splitlines()[1:]
    second = build_version("b", "c", "d").splitlines()[3:]
    assert first == second
    assert all(line.split(": ", 1)[1] for line in first)