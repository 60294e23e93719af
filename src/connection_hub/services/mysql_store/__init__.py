"""
MySQL 连接服务
作为 service_path 使用: src.connection_hub.services.mysql_store
"""
