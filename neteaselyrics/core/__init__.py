"""核心模块 - 数据类和抽象接口"""
