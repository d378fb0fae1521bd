"""
Unit Tests - 单元测试

该目录包含核心模块和各小游戏引擎的单元测试。
"""
