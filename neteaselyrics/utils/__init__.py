"""工具模块 - 配置、日志、HTTP传输和文本处理"""
