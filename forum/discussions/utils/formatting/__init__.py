"""Formatting utilities - response envelope with BSON-safe payloads"""
from .response_formatter import ok, bad_request, server_error, to_json_safe
