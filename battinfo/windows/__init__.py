"""Decoding of the Windows battery information and status structures."""