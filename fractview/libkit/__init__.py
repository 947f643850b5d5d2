"""Helpers for characters, strings, numbers, output, buffers, linked lists and line reading."""