"""
Tests Module - 测试框架

Test Categories:
    unit/: 单元测试 - 测试单个模块功能
    property/: 性质测试 - 验证账本与小游戏结算的不变量
    integration/: 集成测试 - 通过GameHost驱动完整对局
"""
