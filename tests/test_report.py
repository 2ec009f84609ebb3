# Tests del reporte CSV
# Ejecutar con: pytest tests/test_report.py -v

import csv
import threading

import pytest

from core.domain.results import Evidence, PDNResult, SampleValue
from core.domain.schema import ColumnInfo, TableInfo, TableKind


def _email_result():
    return PDNResult.for_column(
        "crm",
        TableInfo("dbo", "users", TableKind.VIEW),
        ColumnInfo("col1", "nvarchar"),
        Evidence.VALUE,
        "Email",
        SampleValue("name@example.com", "AAAA#AAAAAAA#AAA"),
    )


def _read(path):
    with open(path, encoding="utf-8-sig", newline="") as f:
        return list(csv.DictReader(f))


@pytest.mark.unit
class TestReportRow:
    """Conversión de PDNResult a fila"""

    def test_from_result(self):
        from adapters.outbound.report import ReportRow
        row = ReportRow.from_result(_email_result(), server="srv01")
        record = row.as_record()
        assert record["server"] == "srv01"
        assert record["schema"] == "dbo"
        assert record["object_type"] == "VIEW"
        assert record["has_pdn"] == "Yes"
        assert record["evidence"] == "VALUE"
        assert record["masked_sample_value"] == "name****.com"

    def test_unprocessed_is_not_pdn(self):
        from adapters.outbound.report import ReportRow
        result = PDNResult.timeout("crm", TableInfo("dbo", "users"), ColumnInfo("slow"))
        record = ReportRow.from_result(result).as_record()
        assert record["has_pdn"] == "No"
        assert record["pdn_type"] == "Unprocessed"
        assert record["sample_value"] == "N/A"
        assert record["masked_sample_value"] == "N/A"

    def test_field_names(self):
        from adapters.outbound.report import ReportRow
        assert ReportRow.field_names() == [
            "server",
            "database",
            "schema",
            "table",
            "object_type",
            "column",
            "data_type",
            "has_pdn",
            "pdn_type",
            "evidence",
            "pattern",
            "sample_value",
            "masked_sample_value",
        ]


@pytest.mark.unit
class TestCSVReportWriter:
    """Escritura asíncrona del reporte"""

    def test_writes_rows(self, tmp_path):
        from adapters.outbound.report import CSVReportWriter
        path = tmp_path / "report.csv"

        with CSVReportWriter(str(path), server="srv01") as writer:
            writer.emit(_email_result())
            writer.emit(PDNResult.timeout("crm", TableInfo("dbo", "users"), ColumnInfo("slow")))

        rows = _read(path)
        assert len(rows) == 2
        assert rows[0]["column"] == "col1"
        assert rows[0]["sample_value"] == "name@example.com"
        assert rows[0]["masked_sample_value"] == "name****.com"
        assert rows[1]["evidence"] == "TIMEOUT"
        assert writer.rows_written == 2

    def test_utf8_bom(self, tmp_path):
        from adapters.outbound.report import CSVReportWriter
        path = tmp_path / "report.csv"

        with CSVReportWriter(str(path)) as writer:
            writer.emit(
                PDNResult.for_column(
                    "crm",
                    TableInfo("dbo", "адреса"),
                    ColumnInfo("addr"),
                    Evidence.VALUE,
                    "Address",
                    SampleValue("ул. Ленина, дом 5", "AA# AAAAAA# AAA 9"),
                )
            )

        assert path.read_bytes().startswith(b"\xef\xbb\xbf")
        assert _read(path)[0]["table"] == "адреса"

    def test_header_only_when_empty(self, tmp_path):
        from adapters.outbound.report import CSVReportWriter
        path = tmp_path / "report.csv"

        with CSVReportWriter(str(path)):
            pass

        assert _read(path) == []
        assert "masked_sample_value" in path.read_text(encoding="utf-8-sig")

    def test_emit_before_start_fails(self, tmp_path):
        from adapters.outbound.report import CSVReportWriter
        from core.domain.errors import ReportError
        writer = CSVReportWriter(str(tmp_path / "report.csv"))
        with pytest.raises(ReportError):
            writer.emit(_email_result())

    def test_bad_path(self, tmp_path):
        from adapters.outbound.report import CSVReportWriter
        from core.domain.errors import ReportError
        writer = CSVReportWriter(str(tmp_path / "missing" / "report.csv"))
        with pytest.raises(ReportError) as exc:
            writer.start()
        assert exc.value.code == "REPORT_ERROR"

    def test_full_queue_fails_fast(self, tmp_path):
        from adapters.outbound.report import CSVReportWriter
        from core.domain.errors import ReportError
        path = tmp_path / "report.csv"
        unblock = threading.Event()

        writer = CSVReportWriter(str(path), queue_size=1, put_timeout=0.05).start()
        real_writer = writer._writer

        class StuckWriter:
            def writerow(self, record):
                unblock.wait(5)
                real_writer.writerow(record)

        writer._writer = StuckWriter()
        try:
            with pytest.raises(ReportError):
                for _ in range(5):
                    writer.emit(_email_result())
        finally:
            unblock.set()
            writer.put_timeout = 5
            writer.close()

        assert len(_read(path)) >= 1
