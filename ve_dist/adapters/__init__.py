"""适配器层"""
