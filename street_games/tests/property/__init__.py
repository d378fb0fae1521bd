"""
Property Tests - 性质测试

基于hypothesis的性质测试，验证余额取整、历史最高余额单调性和下注上下限约束。
"""
