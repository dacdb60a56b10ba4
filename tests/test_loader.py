from pathlib import Path
import sys
import textwrap

import pytest

from seqtest.core import ConfigError, RegistrationError, Suite
from seqtest.loader import discover, import_entry, load_suite

TEST_MODULE = textwrap.dedent(
    """
    from seqtest.core import expect, is_true


    def main(suite):
        suite.group("{group}", lambda g: g.test("t", lambda: expect(True, is_true)))
    """
)


def _write(path: Path, group: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(TEST_MODULE.format(group=group), encoding="utf-8")
    return path


def test_load_suite_from_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "one_test.py", "one")
    suite = load_suite([str(path)])
    assert [case.identifier() for case in suite.cases()] == ["one > t"]


def test_directory_discovery_is_sorted_and_recursive(tmp_path: Path) -> None:
    _write(tmp_path / "b_test.py", "b")
    _write(tmp_path / "nested" / "test_a.py", "nested")
    _write(tmp_path / "a_test.py", "a")
    (tmp_path / "helper.py").write_text("raise RuntimeError('not a test file')\n", encoding="utf-8")
    found = discover(tmp_path)
    assert [p.name for p in found] == ["a_test.py", "b_test.py", "test_a.py"]
    suite = load_suite([str(tmp_path)])
    assert [group.name for group in suite.groups] == ["a", "b", "nested"]


def test_sibling_modules_are_importable(tmp_path: Path) -> None:
    (tmp_path / "sibling_app_mod.py").write_text("VALUE = True\n", encoding="utf-8")
    (tmp_path / "app_test.py").write_text(
        "from sibling_app_mod import VALUE\n"
        "def main(suite):\n"
        "    suite.group('g', lambda g: g.test(str(VALUE), lambda: None))\n",
        encoding="utf-8",
    )
    suite = load_suite([str(tmp_path / "app_test.py")])
    assert [case.name for case in suite.cases()] == ["True"]


def test_missing_file_and_missing_main(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_suite([str(tmp_path / "absent_test.py")])
    path = tmp_path / "nomain_test.py"
    path.write_text("x = 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Function 'main' not found"):
        load_suite([str(path)])


def test_registration_errors_surface_while_loading(tmp_path: Path) -> None:
    path = tmp_path / "orphan_test.py"
    path.write_text("def main(suite):\n    suite.test('orphan', lambda: None)\n", encoding="utf-8")
    with pytest.raises(RegistrationError):
        load_suite([str(path)])


def test_import_entry_by_dotted_path() -> None:
    entry = import_entry("seqtest.config:load_config")
    assert callable(entry)
    with pytest.raises(ConfigError, match="Cannot import"):
        import_entry("no_such_module_here")
    with pytest.raises(ConfigError, match="not found"):
        import_entry("seqtest.config")


def test_load_suite_appends_to_given_suite(tmp_path: Path) -> None:
    suite = Suite()
    suite.group("existing", lambda g: g.test("t", lambda: None))
    load_suite([str(_write(tmp_path / "x_test.py", "x"))], suite)
    assert [group.name for group in suite.groups] == ["existing", "x"]


def test_import_time_errors_become_config_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken_import_test.py"
    path.write_text("import does_not_exist_anywhere\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to load test module") as excinfo:
        load_suite([str(path)])
    assert isinstance(excinfo.value.__cause__, ImportError)
    assert not [name for name in sys.modules if name.startswith("seqtest_module_broken_import_test_")]


def test_syntax_errors_become_config_errors(tmp_path: Path) -> None:
    path = tmp_path / "syntax_test.py"
    path.write_text("def main(suite)\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to load test module"):
        load_suite([str(path)])
