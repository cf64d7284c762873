#!/usr/bin/env python3
"""
Extraction Module - Regex heuristics that turn resume text into profile fields.

Handles:
- Section detection on normalized text
- Skills, experience years, education level/field and projects excerpt
- Parsing stored resumes through the repository layer
"""
from extraction.models import ExtractedFields
from extraction.service import ProfileExtractionService
from extraction.years_extractor import YearsExtractor

__all__ = [
    'ExtractedFields',
    'ProfileExtractionService',
    'YearsExtractor',
]
