"""
Property Tests - 属性测试

该目录包含基于hypothesis的性质测试，验证卡牌编码和牌组显示的不变量。
"""
