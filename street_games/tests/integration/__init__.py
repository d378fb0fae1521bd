"""
Integration Tests - 集成测试

通过GameHost驱动账本与小游戏引擎协作的完整流程。
"""
