"""X11 surface enumeration, pointer sampling and relocation"""
