"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, session verification
- api_keys/: API key issuance and verification
- classes/: Class management
- students/: Student management
- enrollments/: Class rosters
- attendance/: Attendance marking, lookups and statistics

Import from subdirectories.
"""
