# routes/emails.py
from flask import current_app, redirect, render_template, request, url_for


def show():
    return render_template('email/show.html', message='Send a test email')


def create():
    """Send the multipart test email, logo included, then go home"""
    recipient = request.form.get('recipient', '')
    mailer = current_app.mailer
    mailer.deliver(mailer.multipart_email(recipient, add_logo=True))
    return redirect(url_for('root'))
