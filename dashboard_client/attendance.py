"""
Marking a class section's attendance for one day.
"""
from .envelope import success_message
from .page import ResourcePage
from .pages import ATTENDANCE_STATUSES, attendance_page

DEFAULT_STATUS = 'present'


class AttendanceSheet(ResourcePage):
    """
    The attendance page plus the unsaved marks of the loaded students.

    A student without a mark shows the saved status, or ``present`` when
    the day has not been taken yet. Marks are dropped whenever the class,
    section or date changes.
    """

    def __init__(self, api, notifier=None, confirm=None):
        self.marks = {}
        super().__init__(api, attendance_page(), notifier, confirm)

    def _filters_changed(self, changed):
        self.marks = {}
        super()._filters_changed(changed)

    def status(self, record):
        mark = self.marks.get(record['studentId'])
        if mark:
            return mark['status']
        saved = record.get('attendance') or {}
        return saved.get('status') or DEFAULT_STATUS

    def remark(self, record):
        mark = self.marks.get(record['studentId'])
        if mark:
            return mark['remark']
        saved = record.get('attendance') or {}
        return saved.get('remark')

    def mark(self, student_id, status, remark=None):
        if status not in ATTENDANCE_STATUSES:
            raise ValueError(f"Unknown attendance status: {status}")
        self.marks[student_id] = {'status': status, 'remark': remark}

    def mark_all(self, status):
        for record in self.items:
            self.mark(record['studentId'], status, self.remark(record))

    def entries(self):
        return [
            {
                'studentId': record['studentId'],
                'status': self.status(record),
                'remark': self.remark(record),
            }
            for record in self.items
        ]

    def save(self):
        """POST the whole sheet, then reload it with the saved marks."""
        if self.pending or not self.items:
            return False
        if not self.filters.is_complete(self.config.required_filters):
            return False

        body = self._send('POST', self.config.endpoint, {
            'date': self.filters.get('date'),
            'classId': self.filters.get('classId'),
            'sectionId': self.filters.get('sectionId'),
            'attendances': self.entries(),
        })
        if body is None:
            return False

        self.notifier.success(success_message(body, 'Attendance saved'))
        self.marks = {}
        self.refresh()
        return True
