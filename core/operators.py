"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivideByZeroError

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符和函数的静态方法集合，参数为按从左到右顺序排列的操作数列表"""

    @staticmethod
    def _scalar(result):
        """numpy标量转回Python float"""
        return float(result)

    # 二元操作符========================================
    @staticmethod
    def plus(operands):
        with np.errstate(over='ignore', invalid='ignore'):
            result = np.add(operands[0], operands[1])
        return Operators._scalar(result)

    @staticmethod
    def minus(operands):
        with np.errstate(over='ignore', invalid='ignore'):
            result = np.subtract(operands[0], operands[1])
        return Operators._scalar(result)

    @staticmethod
    def multiply(operands):
        with np.errstate(over='ignore', invalid='ignore'):
            result = np.multiply(operands[0], operands[1])
        return Operators._scalar(result)

    @staticmethod
    def divide(operands):
        """除法，除数恰好为0时报错"""
        if operands[1] == 0:
            raise DivideByZeroError()
        with np.errstate(over='ignore', invalid='ignore'):
            result = np.divide(operands[0], operands[1])
        return Operators._scalar(result)

    @staticmethod
    def power(operands):
        """乘方；负数的非整数次幂得到 NaN，0的负数次幂得到 inf，由求值器统一检查"""
        with np.errstate(all='ignore'):
            result = np.power(np.float64(operands[0]), np.float64(operands[1]))
        return Operators._scalar(result)

    # 函数========================================
    @staticmethod
    def sin(operands):
        return Operators._scalar(np.sin(operands[0]))

    @staticmethod
    def cos(operands):
        return Operators._scalar(np.cos(operands[0]))

    @staticmethod
    def tg(operands):
        with np.errstate(all='ignore'):
            result = np.tan(operands[0])
        return Operators._scalar(result)

    @staticmethod
    def ctg(operands):
        """余切: ctg(x) = tan(pi/2 - x)"""
        with np.errstate(all='ignore'):
            result = np.tan(np.pi / 2 - operands[0])
        return Operators._scalar(result)

    @staticmethod
    def max(operands):
        return Operators._scalar(np.maximum(operands[0], operands[1]))

    # 检查========================================
    @staticmethod
    def is_finite(value):
        return bool(np.isfinite(value))
