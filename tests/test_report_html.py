"""
Tests for HTML report generation and the resource bundler.

Tests context building, template rendering and the writer session contract.
"""

import pytest

from xsdiff.analyze.diff import ComparisonRecord
from xsdiff.exceptions import ResourceMissing
from xsdiff.report import HTML_RESOURCES, HtmlReportWriter, ResourceBundler, build_writers
from xsdiff.report.base import report_file_name
from xsdiff.report.html import build_report_context, render_report_template


@pytest.fixture
def records():
    return [
        ComparisonRecord("AddressType"),
        ComparisonRecord("CustomerType", only_in_first="element: name (xs:string)"),
        ComparisonRecord("OrderType", only_in_second="ENTIRE TYPE: element: id (xs:int)"),
    ]


class TestBuildReportContext:
    """Tests for build_report_context."""

    def test_row_status(self, records):
        """Test rows are flagged same, changed or added."""
        context = build_report_context(["comparing: a with b"], ("a.xsd", "b.xsd"), records)

        assert [row["status"] for row in context["rows"]] == ["same", "changed", "added"]
        assert context["summary"] == {"types": 3, "with_differences": 2, "with_additions": 1}

    def test_assets(self, records):
        """Test stylesheet and script links come from the resource manifest."""
        context = build_report_context([], ("a", "b"), records)

        assert context["stylesheets"] == ["css/xsdiff.css"]
        assert context["scripts"] == ["js/xsdiff.js"]


class TestRenderReportTemplate:
    """Tests for template rendering."""

    def test_render(self, records):
        """Test the page contains header, columns and every type."""
        context = build_report_context(["comparing: a.xsd with b.xsd"], ("a.xsd", "b.xsd"), records)

        html = render_report_template(context)

        assert "comparing: a.xsd with b.xsd" in html
        for name in ("AddressType", "CustomerType", "OrderType"):
            assert name in html
        assert "element: name (xs:string)" in html
        assert 'href="css/xsdiff.css"' in html
        assert 'src="js/xsdiff.js"' in html

    def test_escaping(self):
        """Test markup in schema content is escaped."""
        context = build_report_context([], ("a", "b"), [ComparisonRecord("<script>")])

        html = render_report_template(context)

        assert "<td class=\"type-name\">&lt;script&gt;</td>" in html


class TestHtmlReportWriter:
    """Tests for the writer session."""

    def test_session_writes_file(self, tmp_path, records):
        """Test finish() writes diff-report-<hint>.html."""
        writer = HtmlReportWriter()
        writer.start(tmp_path, "customer.xsd", ("old.xsd", "new.xsd"))
        writer.write_header("comparing: old.xsd with new.xsd")
        writer.write_records(records)

        report = writer.finish()

        assert report == tmp_path / "diff-report-customer.xsd.html"
        content = report.read_text()
        assert "comparing: old.xsd with new.xsd" in content
        assert "old.xsd" in content
        assert not writer.active

    def test_nothing_written_before_finish(self, tmp_path, records):
        """Test the report only appears on finish()."""
        writer = HtmlReportWriter()
        writer.start(tmp_path, "x.xsd")
        writer.write_records(records)

        assert list(tmp_path.iterdir()) == []

    def test_requires_session(self):
        """Test writing without start() fails."""
        with pytest.raises(RuntimeError):
            HtmlReportWriter().write_header("x")

    def test_double_start(self, tmp_path):
        """Test sessions cannot overlap."""
        writer = HtmlReportWriter()
        writer.start(tmp_path, "a.xsd")

        with pytest.raises(RuntimeError):
            writer.start(tmp_path, "b.xsd")

    def test_report_file_name_flattens_paths(self):
        """Test hints with folders stay inside the report folder."""
        assert report_file_name("orders/v2.xsd", "html") == "diff-report-orders_v2.xsd.html"


class TestResourceBundler:
    """Tests for static asset bundling."""

    def test_bundle(self, tmp_path):
        """Test every resource is copied into its sub-folder."""
        written = ResourceBundler().bundle(tmp_path)

        assert written == [tmp_path / res for res in HTML_RESOURCES]
        assert all(path.is_file() for path in written)

    def test_missing_resource(self, tmp_path):
        """Test a missing asset raises ResourceMissing."""
        bundler = ResourceBundler(resource_root=tmp_path / "nowhere")

        with pytest.raises(ResourceMissing) as exc_info:
            bundler.bundle(tmp_path / "out")

        assert exc_info.value.name == "css/xsdiff.css"


class TestBuildWriters:
    """Tests for writer selection."""

    def test_known_formats(self):
        """Test one writer per format, in order."""
        writers = build_writers(["xlsx", "html"])
        assert [w.extension for w in writers] == ["xlsx", "html"]

    def test_unknown_format(self):
        """Test unsupported formats are rejected."""
        with pytest.raises(ValueError, match="Unsupported report format"):
            build_writers(["pdf"])
