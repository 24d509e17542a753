"""Tests for file filtering and marker scanning."""

from console_log_check.config import DEFAULT_EXTENSIONS
from console_log_check.scanner import ScanResult, filter_source_files, scan_files


class TestFilterSourceFiles:
    """Test extension and existence filtering."""

    def test_keeps_only_js_and_ts_extensions(self, temp_dir):
        names = ["a.ts", "b.tsx", "c.js", "d.jsx", "e.py", "f.json", "g.ts.bak", "README.md"]
        for name in names:
            (temp_dir / name).write_text("x")

        kept = filter_source_files(names, DEFAULT_EXTENSIONS, temp_dir)

        assert kept == ["a.ts", "b.tsx", "c.js", "d.jsx"]

    def test_extension_match_is_case_sensitive(self, temp_dir):
        (temp_dir / "Upper.TS").write_text("x")
        assert filter_source_files(["Upper.TS"], DEFAULT_EXTENSIONS, temp_dir) == []

    def test_skips_missing_files(self, temp_dir):
        (temp_dir / "here.ts").write_text("x")

        kept = filter_source_files(["here.ts", "deleted.ts"], DEFAULT_EXTENSIONS, temp_dir)

        assert kept == ["here.ts"]

    def test_skips_directories(self, temp_dir):
        (temp_dir / "weird.js").mkdir()
        assert filter_source_files(["weird.js"], DEFAULT_EXTENSIONS, temp_dir) == []

    def test_preserves_order(self, temp_dir):
        for name in ("z.ts", "a.ts", "m.ts"):
            (temp_dir / name).write_text("x")

        kept = filter_source_files(["z.ts", "a.ts", "m.ts"], DEFAULT_EXTENSIONS, temp_dir)

        assert kept == ["z.ts", "a.ts", "m.ts"]

    def test_resolves_nested_paths_against_root(self, temp_dir):
        (temp_dir / "src").mkdir()
        (temp_dir / "src" / "index.js").write_text("x")

        assert filter_source_files(["src/index.js"], DEFAULT_EXTENSIONS, temp_dir) == [
            "src/index.js"
        ]


class TestScanFiles:
    """Test marker detection."""

    def test_finds_marker(self, temp_dir):
        (temp_dir / "x.js").write_text('console.log("hi")\n')
        (temp_dir / "y.js").write_text("export const y = 1;\n")

        result = scan_files(["x.js", "y.js"], temp_dir)

        assert result.findings == ["x.js"]
        assert result.found
        assert result.read_errors == []

    def test_substring_match_without_call(self, temp_dir):
        (temp_dir / "a.ts").write_text("const log = console.log;\n")
        assert scan_files(["a.ts"], temp_dir).findings == ["a.ts"]

    def test_other_console_methods_do_not_match(self, temp_dir):
        (temp_dir / "a.ts").write_text("console.error('x'); console.warn('y');\n")
        assert not scan_files(["a.ts"], temp_dir).found

    def test_reports_each_finding_through_callback(self, temp_dir):
        for name in ("a.ts", "b.ts"):
            (temp_dir / name).write_text("console.log(1)")
        seen = []

        scan_files(["a.ts", "b.ts"], temp_dir, on_finding=seen.append)

        assert seen == ["a.ts", "b.ts"]

    def test_non_utf8_bytes_do_not_hide_a_match(self, temp_dir):
        (temp_dir / "legacy.js").write_bytes(b"// caf\xe9\nconsole.log('x')\n")
        (temp_dir / "good.js").write_text("console.log(1)")

        result = scan_files(["legacy.js", "good.js"], temp_dir)

        assert result.findings == ["legacy.js", "good.js"]
        assert result.read_errors == []

    def test_non_utf8_file_without_marker_is_clean(self, temp_dir):
        (temp_dir / "latin1.ts").write_bytes(b"// \xe9t\xe9\nexport {};\n")

        result = scan_files(["latin1.ts"], temp_dir)

        assert not result.found
        assert result.read_errors == []

    def test_file_removed_mid_scan_is_recorded(self, temp_dir):
        result = scan_files(["vanished.ts"], temp_dir)

        assert not result.found
        assert [e.path for e in result.read_errors] == ["vanished.ts"]

    def test_empty_result(self):
        result = ScanResult()
        assert not result.found
        assert result.findings == []
