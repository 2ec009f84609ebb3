from adapters.outbound.report.csv_writer import CSVReportWriter, ReportRow

__all__ = ["CSVReportWriter", "ReportRow"]
