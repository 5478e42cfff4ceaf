import contextvars
import logging

# 当前请求的日志前缀，例如 "[GCJ02 116.404,39.915] "
request_context_var = contextvars.ContextVar('request_context', default='')

class ContextFilter(logging.Filter):
    """
    一个自定义的日志过滤器，它将上下文变量中的值注入到日志记录中。
    """
    def filter(self, record):
        record.context = request_context_var.get()
        return True

def format_context(system, location=None, lng=None, lat=None):
    """构造日志前缀；没有 location 时用 lng/lat 拼接，坐标缺失时只保留坐标系。"""
    if location is None and lng is not None and lat is not None:
        location = f"{lng},{lat}"
    if location is None:
        return f"[{system}] "
    return f"[{system} {location}] "
