"""配置文件"""

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 输出配置
OUTPUT_CONFIG = {
    "precision": 10,  # 打印结果的有效数字位数
    "separator": "===================",
    "results_path": "eval_results.csv",
}

# 未提供输入时演示用的表达式
DEMO_EXPRESSIONS = [
    "   -123 + 12 * 3  ",
    "(2 * 3) + 1",
    "(-1 + 2) * 3",
    " 3 + 4 * 2/(1-5)^2^3",
    "5 * 3 + (4 + 2 % 2 * 8)",
    "-123 + 4 - 16 +(-3-4)-6",
    "-Pi + 3.2 - 4 + (-3 + 2)-E*3",
    "2.398+14.23+3-e*3+(-3)",
    ",-123,,+cos(-3)",
    "-sin ( max ( 2, 3 ) / 3 * PI )",
    "-sqrt(2)",
]


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR"), "未知日志级别"
    assert 1 <= OUTPUT_CONFIG["precision"] <= 17, "float最多17位有效数字"
    assert OUTPUT_CONFIG["results_path"].endswith(".csv"), "结果以CSV保存"
    assert DEMO_EXPRESSIONS, "演示表达式不能为空"
    print("Configuration validated successfully!")
