"""Validation utilities - Input validation"""
from .input_validator import InputValidator, get_json_data, get_optional_query_params
