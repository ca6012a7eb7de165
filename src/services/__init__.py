"""Services for the Console Game Hub"""
