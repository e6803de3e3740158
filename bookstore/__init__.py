"""Bookstore API —— 图书 CRUD + 问候接口"""

__version__ = "1.0.0"
