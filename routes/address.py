# routes/address.py
from flask import Response, current_app, render_template, request


def show():
    return render_template('address/show.html', message='Search for a postcode')


def create():
    """Relay the address facade's answer for the submitted postcode"""
    postcode = request.form.get('postcode', '')
    upstream = current_app.address_client.fetch_postcode(postcode)
    # Body bytes go out exactly as the facade sent them
    return Response(upstream.content, status=200, mimetype='application/json')
