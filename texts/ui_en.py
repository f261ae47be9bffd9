# texts/ui_en.py
# User-facing strings, kept out of the services

LOAD_ERROR = "Failed to load incident data. Please try again later."
EMPTY_CARDS = "No incidents found"
EMPTY_CARDS_HINT = "Try selecting “All” or a different type."

REPORT_SUBMITTED = "✅ Report submitted successfully!"
REPORT_FAILED = "Failed to submit report"
REPORT_ERROR_PREFIX = "❌ "
BAD_SEVERITY = "Severity must be one of low, medium, high, critical (or 1-4)."
BAD_COORDINATES = "Latitude must be within -90..90 and longitude within -180..180."
MISSING_FIELDS = "Type and description are required."

LOGIN_OK = "Login successful!"
LOGIN_FAILED = "Login failed."
SIGNUP_OK = "Signup successful!"
SIGNUP_FAILED = "Signup failed."
PASSWORD_MISMATCH = "Passwords do not match!"

NO_LOCATION = "No location"
