"""Service layer — wraps domain parsers in the ServiceResult contract."""
