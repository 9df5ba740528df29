"""core/operators.py"""
import numpy as np


class Operators:
    """所有操作符和函数的静态方法集合，结果统一为Python float"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.add(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.subtract(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.multiply(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除零按IEEE返回inf/nan，不抛异常"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return float(np.divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mod(operand1, operand2):
        """取余：与C的fmod一致，符号跟随被除数"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.fmod(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    # 一元函数====================
    @staticmethod
    def sin(operand):
        """正弦"""
        with np.errstate(invalid='ignore'):
            return float(np.sin(np.float64(operand)))

    @staticmethod
    def cos(operand):
        """余弦"""
        with np.errstate(invalid='ignore'):
            return float(np.cos(np.float64(operand)))

    @staticmethod
    def sqrt(operand):
        """平方根，负数返回nan"""
        with np.errstate(invalid='ignore'):
            return float(np.sqrt(np.float64(operand)))

    # 二元函数====================
    @staticmethod
    def max(operand1, operand2):
        """较大值：operand1 > operand2 时取operand1，否则取operand2（含nan时不对称）"""
        with np.errstate(invalid='ignore'):
            return float(np.where(np.float64(operand1) > np.float64(operand2), operand1, operand2))
