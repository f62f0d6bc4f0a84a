#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
配置文件读取器
读取 sailthru.yaml（账户凭证 + HTTP/日志设置），环境变量可覆盖账户字段
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from ..core.errors import ConfigurationError

CONFIG_FILE = 'sailthru.yaml'
EXAMPLE_FILE = 'sailthru.example.yaml'

# 环境变量 -> 账户字段
ENV_OVERRIDES = {
    'SAILTHRU_API_KEY': 'api_key',
    'SAILTHRU_API_SECRET': 'api_secret',
    'SAILTHRU_API_URL': 'api_url',
}

REQUIRED_ACCOUNT_FIELDS = ('api_key', 'api_secret')

# http 段默认值，对应 AbstractSailthruClient 的构造参数
HTTP_DEFAULTS = {
    'timeout': 30,
    'pool_connections': 10,
    'pool_maxsize': 10,
    'user_agent': 'Sailthru Python Client/1.0',
    'expect_continue': True,
    'strict_scheme': False,
}


class ConfigReader:
    """配置文件读取器类"""

    def __init__(self, config_dir: str = None, environ: Optional[Dict[str, str]] = None):
        """
        Args:
            config_dir: 配置文件目录路径，默认为当前文件所在目录
            environ: 环境变量映射，默认 os.environ
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self.environ = os.environ if environ is None else environ
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        加载YAML配置文件

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self._logger.error(f"YAML解析错误 {filename}: {e}")
            raise

        self._configs[filename] = config
        self._logger.info(f"成功加载配置文件: {filename}")
        return config

    def _get(self, filename: str = CONFIG_FILE) -> Dict[str, Any]:
        if filename not in self._configs:
            self.load_yaml(filename)
        return self._configs[filename]

    def get_account_config(self, account: str = None) -> Dict[str, Any]:
        """
        获取账户配置

        Examples:
            reader.get_account_config()        # 所有账户
            reader.get_account_config('main')  # main 账户（已应用环境变量覆盖）
        """
        accounts = self._get().get('accounts') or {}
        if account is None:
            return accounts

        config = dict(accounts.get(account) or {})
        for env_key, field in ENV_OVERRIDES.items():
            if self.environ.get(env_key):
                config[field] = self.environ[env_key]
        return config

    def get_account_credentials(self, account: str = 'main') -> Dict[str, str]:
        """
        获取账户认证信息，缺少 api_key / api_secret 时抛出 ConfigurationError
        """
        config = self.get_account_config(account)
        missing = [field for field in REQUIRED_ACCOUNT_FIELDS if field not in config]
        if missing:
            raise ConfigurationError(f"账户 {account} 缺少字段: {', '.join(missing)}")

        credentials = {
            'api_key': str(config['api_key']),
            'api_secret': str(config['api_secret'] or ''),
        }
        if config.get('api_url'):
            credentials['api_url'] = str(config['api_url'])
        return credentials

    def get_http_config(self) -> Dict[str, Any]:
        """获取 HTTP 设置，未配置的项使用默认值"""
        http = dict(HTTP_DEFAULTS)
        http.update({k: v for k, v in (self._get().get('http') or {}).items() if k in HTTP_DEFAULTS})
        return http

    def get_logging_config(self) -> Dict[str, Any]:
        return dict(self._get().get('logging') or {})

    def list_available_accounts(self) -> list:
        return list(self.get_account_config().keys())

    def validate_account_config(self, account: str) -> bool:
        """验证账户配置是否完整"""
        try:
            self.get_account_credentials(account)
            return True
        except (ConfigurationError, FileNotFoundError, yaml.YAMLError) as e:
            self._logger.error(f"验证账户配置失败 {account}: {e}")
            return False

    def get_config(self, filename: str, key_path: str = None) -> Any:
        """
        获取配置文件中的指定值

        Examples:
            reader.get_config('sailthru.yaml', 'accounts.main.api_key')
            reader.get_config('sailthru.yaml', 'http.timeout')
        """
        config = self._get(filename)

        if key_path is None:
            return config

        value = config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            self._logger.warning(f"配置键不存在: {key_path}")
            return None

    def reload_config(self, filename: str = None):
        """
        重新加载配置文件

        Args:
            filename: 要重新加载的配置文件名，为None时重新加载所有配置
        """
        if filename:
            self._configs.pop(filename, None)
            self.load_yaml(filename)
        else:
            self._configs.clear()
            for file_path in self.config_dir.glob('*.yaml'):
                if file_path.name != EXAMPLE_FILE:  # 跳过示例文件
                    self.load_yaml(file_path.name)
