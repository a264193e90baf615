"""
Excel Parser - Client Import From Excel/CSV
============================================

Parses an Excel or CSV export and auto-detects the client columns.
Supports .xlsx, .xls, and .csv formats.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

# Common column name variations for auto-detection
NAME_PATTERNS = ['name', 'customer', 'client', 'full_name', 'fullname', 'customer_name', 'client_name']
EMAIL_PATTERNS = ['email', 'e-mail', 'mail', 'email_address']
PHONE_PATTERNS = ['phone', 'mobile', 'cell', 'telephone', 'phone_number', 'mobile_number']


class ExcelParser:
    """
    Excel/CSV parser with auto-detection of client columns.

    Usage:
        parser = ExcelParser()
        clients, columns = parser.parse("clients.xlsx")
        # clients: [{"name": "Jess", "email": "jess@example.com", "phone": "15551234567"}, ...]
    """

    def __init__(self):
        self.detected_columns: Dict[str, Optional[str]] = {}

    def parse(self, file_path: str, sheet_name: Optional[str] = None) -> Tuple[List[Dict], Dict[str, Optional[str]]]:
        """
        Parse Excel/CSV file and return client data.

        Args:
            file_path: Path to the file (.xlsx, .xls, .csv)
            sheet_name: Optional sheet name for Excel files

        Returns:
            Tuple of (clients list, detected column mapping)
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        ext = path.suffix.lower()
        if ext == '.csv':
            df = pd.read_csv(file_path, dtype=str)
        elif ext in ['.xlsx', '.xls']:
            df = pd.read_excel(file_path, sheet_name=sheet_name or 0, dtype=str)
        else:
            raise ValueError(f"Unsupported file format: {ext}. Use .xlsx, .xls, or .csv")

        return self.parse_frame(df)

    def parse_frame(self, df: pd.DataFrame) -> Tuple[List[Dict], Dict[str, Optional[str]]]:
        """Extract clients from an already loaded DataFrame."""
        df = df.copy()
        df.columns = [str(c).strip().lower() for c in df.columns]

        # Email first so "email" never gets claimed as a name column
        email_col = self._find_column(df.columns, EMAIL_PATTERNS)
        phone_col = self._find_column(df.columns, PHONE_PATTERNS, exclude={email_col})
        name_col = self._find_column(df.columns, NAME_PATTERNS, exclude={email_col, phone_col})

        self.detected_columns = {
            'name': name_col,
            'email': email_col,
            'phone': phone_col,
        }
        logger.info(f"Detected columns: {self.detected_columns}")

        if not name_col:
            raise ValueError("Could not detect 'Name' column. Please ensure your file has a column with client names.")

        if not email_col and not phone_col:
            raise ValueError("Could not detect an 'Email' or 'Phone' column.")

        clients = []
        for _, row in df.iterrows():
            name = self._clean_text(row.get(name_col))
            email = self._clean_text(row.get(email_col)).lower() if email_col else ''
            phone = self._clean_phone(self._clean_text(row.get(phone_col))) if phone_col else ''

            # Skip rows nobody can be contacted on
            if not name or not (email or phone):
                continue

            clients.append({'name': name, 'email': email, 'phone': phone})

        logger.info(f"Parsed {len(clients)} clients")
        return clients, self.detected_columns

    def _find_column(self, columns, patterns: List[str], exclude: Optional[set] = None) -> Optional[str]:
        """Find column matching any of the patterns."""
        exclude = exclude or set()
        for col in columns:
            if col in exclude:
                continue
            for pattern in patterns:
                if pattern in col:
                    return col
        return None

    def _clean_text(self, value) -> str:
        if value is None or pd.isna(value):
            return ''
        text = str(value).strip()
        return '' if text.lower() == 'nan' else text

    def _clean_phone(self, phone: str) -> str:
        """
        Normalize phone number to digits.
        Removes spaces, dashes, a leading + and a leading 00.
        """
        if not phone:
            return ''

        cleaned = re.sub(r'[^\d+]', '', phone)

        if cleaned.startswith('+'):
            cleaned = cleaned[1:]

        if cleaned.startswith('00'):
            cleaned = cleaned[2:]

        return cleaned


def parse_excel(file_path: str, sheet_name: Optional[str] = None) -> List[Dict]:
    """
    Convenience function to parse Excel/CSV file.

    Returns:
        List of client dictionaries
    """
    parser = ExcelParser()
    clients, _ = parser.parse(file_path, sheet_name)
    return clients
