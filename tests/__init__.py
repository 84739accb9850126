"""
Tests - 测试

该目录包含deck_of_cards的单元测试和属性测试。
"""
