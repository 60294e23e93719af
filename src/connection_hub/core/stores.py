"""
存储类型命名约定

store_name 是开放集合，这里只列出常用的命名，注册表不会据此校验。
"""

MONGO = "mongo"
MYSQL = "mysql"
SEQUALIZE = "sequalize"
REDIS = "redis"
