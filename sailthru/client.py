# -*- coding: utf-8 -*-
# sailthru/client.py
# Sailthru client with one method per common API call.

import os

from .core.abstract_client import AbstractSailthruClient, DEFAULT_API_URL
from .configs.config_reader import ConfigReader
from .params import (
    ApiAction,
    Blast,
    Content,
    Email,
    Event,
    ImportJob,
    MailList,
    Purchase,
    Send,
    Stats,
    Template,
    User,
)
from .utils.logger import RequestLogger


def init_SailthruClient(account='main', config_dir=None, show=False):
    """
    初始化Sailthru客户端

    Args:
        account: 账户名称，对应 sailthru.yaml 中 accounts 下的键
        config_dir: 配置目录，默认读取环境变量 SAILTHRU_CONFIG_DIR，再退回包内 configs 目录
        show: 是否打印使用的账户

    Returns:
        SailthruClient
    """
    reader = ConfigReader(config_dir or os.getenv('SAILTHRU_CONFIG_DIR'))
    credentials = reader.get_account_credentials(account)
    http = reader.get_http_config()
    log_config = reader.get_logging_config()

    logger = None
    if log_config.get('log_dir'):
        logger = RequestLogger(log_config['log_dir'], log_config.get('log_name') or 'sailthru_requests').get_logger()

    if show:
        print(f"使用Sailthru账户: {account} ({credentials.get('api_url', DEFAULT_API_URL)})")

    return SailthruClient(
        credentials['api_key'],
        credentials['api_secret'],
        credentials.get('api_url', DEFAULT_API_URL),
        logger=logger,
        **http
    )


class SailthruClient(AbstractSailthruClient):
    """
    Convenience wrappers over api_get / api_post / api_delete.
    Every method returns the parsed response (dict for JSON).
    """

    # -------------- email --------------
    def get_email(self, email):
        return self.api_get(Email(email))

    def set_email(self, email, vars=None, lists=None, templates=None, **extra):
        """Create or update an email record, ``lists`` maps list name -> 1/0"""
        return self.api_post(Email(email, vars=vars, lists=lists, templates=templates, **extra))

    # -------------- send --------------
    def send(self, template, email, vars=None, options=None, schedule_time=None, **extra):
        return self.api_post(Send(template, email, vars=vars, options=options,
                                  schedule_time=schedule_time, **extra))

    def multi_send(self, template, emails, vars=None, evars=None, options=None, **extra):
        """Send one template to many recipients; ``evars`` holds per-email vars"""
        if not isinstance(emails, str):
            emails = ','.join(emails)
        return self.api_post(Send(template, emails, vars=vars, evars=evars, options=options, **extra))

    def get_send(self, send_id):
        return self.api_get(Send(send_id=send_id))

    def cancel_send(self, send_id):
        return self.api_delete(Send(send_id=send_id))

    # -------------- blast --------------
    def get_blast(self, blast_id):
        return self.api_get(Blast(blast_id=blast_id))

    def schedule_blast(self, name, list_name, schedule_time, from_name, from_email, subject,
                       content_html, content_text, **extra):
        return self.api_post(Blast(name, list_name, schedule_time, from_name, from_email, subject,
                                   content_html, content_text, **extra))

    def update_blast(self, blast_id, **fields):
        return self.api_post(Blast(blast_id=blast_id, **fields))

    def delete_blast(self, blast_id):
        return self.api_delete(Blast(blast_id=blast_id))

    # -------------- template --------------
    def get_template(self, template):
        return self.api_get(Template(template))

    def get_templates(self):
        return self.api_get(ApiAction.TEMPLATE, {})

    def save_template(self, template, **fields):
        return self.api_post(Template(template, **fields))

    def delete_template(self, template):
        return self.api_delete(Template(template))

    # -------------- list --------------
    def get_lists(self):
        return self.api_get(ApiAction.LIST, {})

    def get_list(self, list_name):
        return self.api_get(MailList(list_name))

    def save_list(self, list_name, primary=None, vars=None, **extra):
        return self.api_post(MailList(list_name, primary=primary, vars=vars, **extra))

    def delete_list(self, list_name):
        return self.api_delete(MailList(list_name))

    # -------------- user / event / content --------------
    def get_user(self, id, key=None, fields=None):
        return self.api_get(User(id=id, key=key, fields=fields))

    def save_user(self, id, key=None, vars=None, lists=None, **extra):
        return self.api_post(User(id=id, key=key, vars=vars, lists=lists, **extra))

    def post_event(self, id, event, vars=None, key=None, schedule_time=None):
        return self.api_post(Event(id, event, key=key, vars=vars, schedule_time=schedule_time))

    def push_content(self, url, title=None, tags=None, date=None, **extra):
        return self.api_post(Content(url, title=title, tags=tags, date=date, **extra))

    # -------------- stats / purchase --------------
    def get_stats(self, stat, **filters):
        return self.api_get(Stats(stat, **filters))

    def get_list_stats(self, list_name, date=None):
        return self.get_stats('list', list_name=list_name, date=date)

    def get_blast_stats(self, blast_id, start_date=None, end_date=None):
        return self.get_stats('blast', blast_id=blast_id, start_date=start_date, end_date=end_date)

    def purchase(self, email, items, incomplete=None, message_id=None, **extra):
        return self.api_post(Purchase(email, items, incomplete=incomplete, message_id=message_id, **extra))

    # -------------- job --------------
    def get_job_status(self, job_id):
        return self.api_get(ApiAction.JOB, {'job_id': job_id})

    def process_import_job(self, list_name, emails=None, file=None, report_email=None, postback_url=None):
        """Import into ``list_name`` from a comma separated ``emails`` string or a CSV ``file`` path"""
        if emails is None and file is None:
            raise ValueError("process_import_job needs emails or file")
        if not isinstance(emails, (str, type(None))):
            emails = ','.join(emails)
        job = ImportJob(list_name, emails=emails, file=file, report_email=report_email,
                        postback_url=postback_url)
        return self.api_post(job, job)
