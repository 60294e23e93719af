"""
连接服务模块
每个服务在 connection 子模块中提供 connect / ensure / disconnect 处理器
"""
