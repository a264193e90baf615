from .excel_parser import ExcelParser, parse_excel

__all__ = ["ExcelParser", "parse_excel"]
