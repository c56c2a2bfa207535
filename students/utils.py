"""
Utility functions for the students app.
Handles student spreadsheet parsing for bulk import.
"""
from datetime import date, datetime

import openpyxl
from django.utils.translation import gettext_lazy as _


# Accepted header spellings per field (compared lower-cased and stripped)
HEADER_ALIASES = {
    'admission_no': ['admission_no', 'admission no', 'admissionno', 'admission number', 'adm no'],
    'first_name': ['first_name', 'first name', 'firstname', 'name'],
    'last_name': ['last_name', 'last name', 'lastname', 'surname'],
    'gender': ['gender', 'sex'],
    'dob': ['dob', 'date of birth', 'birth date', 'birthdate'],
    'class': ['class', 'grade', 'class name'],
    'section': ['section', 'group'],
    'roll_no': ['roll_no', 'roll no', 'roll number'],
    'phone': ['phone', 'mobile', 'phone number'],
    'guardian_name': ['guardian_name', 'guardian name', 'guardian', 'parent name'],
    'guardian_phone': ['guardian_phone', 'guardian phone', 'parent phone'],
}

REQUIRED_COLUMNS = ['admission_no', 'first_name', 'gender', 'dob']


def _cell_text(value):
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        # Excel stores numeric IDs as floats
        return str(int(value))
    return str(value).strip()


def map_headers(headers):
    """Map each known field to its column index."""
    column_mapping = {}
    for field, aliases in HEADER_ALIASES.items():
        for i, h in enumerate(headers):
            if h in aliases:
                column_mapping[field] = i
                break
    return column_mapping


def parse_student_workbook(file):
    """
    Parse a student import spreadsheet.

    The first row holds the headers (see HEADER_ALIASES, case-insensitive);
    every following non-empty row is one student.

    Returns:
        list of (row number, dict of field -> text) tuples

    Raises:
        ValueError if the file cannot be read or required columns are missing
    """
    try:
        wb = openpyxl.load_workbook(file, read_only=True, data_only=True)
    except Exception as e:
        raise ValueError(_('Error reading Excel file: %(error)s') % {'error': str(e)})

    try:
        ws = wb.active
        header_row = next(ws.iter_rows(min_row=1, max_row=1, values_only=True), ())
        headers = [_cell_text(h).lower() for h in header_row]

        column_mapping = map_headers(headers)
        missing = [col for col in REQUIRED_COLUMNS if col not in column_mapping]
        if missing:
            raise ValueError(
                _('Missing required columns: %(columns)s. Found headers: %(headers)s') % {
                    'columns': ', '.join(missing),
                    'headers': ', '.join(h for h in headers if h),
                }
            )

        rows = []
        for row_idx, row in enumerate(ws.iter_rows(min_row=2, values_only=True), start=2):
            # Skip empty rows
            if not row or not any(cell not in (None, '') for cell in row):
                continue
            rows.append((row_idx, {
                field: _cell_text(row[index]) if index < len(row) else ''
                for field, index in column_mapping.items()
            }))
        return rows
    finally:
        wb.close()
