"""
Unit Tests - 单元测试

该目录包含所有核心模块的单元测试。
"""
