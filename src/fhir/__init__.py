"""
FHIR model classes, one subpackage per schema version.
"""
