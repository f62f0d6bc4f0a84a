# -*- coding: utf-8 -*-
# sailthru/params/resources.py
# Typed params for the common Sailthru resources.

from .api_params import ApiAction, ApiParams, ApiFileParams


class Email(ApiParams):
    api_call = ApiAction.EMAIL

    def __init__(self, email, vars=None, lists=None, templates=None, verified=None,
                 optout=None, send=None, send_vars=None, change_email=None, **extra):
        super().__init__(**extra)
        self.email = email
        self.vars = vars
        self.lists = lists
        self.templates = templates
        self.verified = verified
        self.optout = optout
        self.send = send
        self.send_vars = send_vars
        self.change_email = change_email


class Send(ApiParams):
    """
    Transactional send. ``email`` may be a comma separated list for multi-send;
    ``send_id`` alone is enough to look up or cancel a send.
    """
    api_call = ApiAction.SEND

    def __init__(self, template=None, email=None, vars=None, evars=None, options=None,
                 schedule_time=None, limit=None, send_id=None, **extra):
        super().__init__(**extra)
        self.template = template
        self.email = email
        self.vars = vars
        self.evars = evars
        self.options = options
        self.schedule_time = schedule_time
        self.limit = limit
        self.send_id = send_id


class Blast(ApiParams):
    api_call = ApiAction.BLAST

    def __init__(self, name=None, list_name=None, schedule_time=None, from_name=None,
                 from_email=None, subject=None, content_html=None, content_text=None,
                 blast_id=None, status=None, copy_blast=None, copy_template=None, **extra):
        super().__init__(**extra)
        self.name = name
        self.list = list_name
        self.schedule_time = schedule_time
        self.from_name = from_name
        self.from_email = from_email
        self.subject = subject
        self.content_html = content_html
        self.content_text = content_text
        self.blast_id = blast_id
        self.status = status
        self.copy_blast = copy_blast
        self.copy_template = copy_template


class Template(ApiParams):
    api_call = ApiAction.TEMPLATE

    def __init__(self, template, subject=None, from_name=None, from_email=None,
                 content_html=None, content_text=None, sample=None, **extra):
        super().__init__(**extra)
        self.template = template
        self.subject = subject
        self.from_name = from_name
        self.from_email = from_email
        self.content_html = content_html
        self.content_text = content_text
        self.sample = sample


class MailList(ApiParams):
    api_call = ApiAction.LIST

    def __init__(self, list_name=None, primary=None, vars=None, **extra):
        super().__init__(**extra)
        self.list = list_name
        self.primary = primary
        self.vars = vars


class User(ApiParams):
    api_call = ApiAction.USER

    def __init__(self, id=None, key=None, keys=None, fields=None, vars=None, lists=None,
                 optout_email=None, login=None, **extra):
        super().__init__(**extra)
        self.id = id
        self.key = key
        self.keys = keys
        self.fields = fields
        self.vars = vars
        self.lists = lists
        self.optout_email = optout_email
        self.login = login


class Event(ApiParams):
    api_call = ApiAction.EVENT

    def __init__(self, id, event, key=None, vars=None, schedule_time=None, **extra):
        super().__init__(**extra)
        self.id = id
        self.event = event
        self.key = key
        self.vars = vars
        self.schedule_time = schedule_time


class Content(ApiParams):
    api_call = ApiAction.CONTENT

    def __init__(self, url, title=None, tags=None, date=None, expire_date=None,
                 description=None, images=None, vars=None, spider=None, **extra):
        super().__init__(**extra)
        self.url = url
        self.title = title
        self.tags = tags
        self.date = date
        self.expire_date = expire_date
        self.description = description
        self.images = images
        self.vars = vars
        self.spider = spider


class Stats(ApiParams):
    api_call = ApiAction.STATS

    def __init__(self, stat, list_name=None, date=None, start_date=None, end_date=None,
                 blast_id=None, template=None, **extra):
        super().__init__(**extra)
        self.stat = stat
        self.list = list_name
        self.date = date
        self.start_date = start_date
        self.end_date = end_date
        self.blast_id = blast_id
        self.template = template


class Purchase(ApiParams):
    api_call = ApiAction.PURCHASE

    def __init__(self, email, items, incomplete=None, message_id=None, extid=None,
                 date=None, **extra):
        super().__init__(**extra)
        self.email = email
        self.items = items
        self.incomplete = incomplete
        self.message_id = message_id
        self.extid = extid
        self.date = date


class ImportJob(ApiParams, ApiFileParams):
    """
    List import job. Either ``emails`` (comma separated) or a ``file`` path;
    the file travels as a multipart part, never inside the json field.
    """
    api_call = ApiAction.JOB

    def __init__(self, list_name, emails=None, file=None, report_email=None,
                 postback_url=None, **extra):
        super().__init__(**extra)
        self.job = 'import'
        self.list = list_name
        self.emails = emails
        self.report_email = report_email
        self.postback_url = postback_url
        self._file = file

    def get_file_params(self):
        return {'file': self._file} if self._file else {}
