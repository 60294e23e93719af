"""
命名连接注册与生命周期管理
"""
