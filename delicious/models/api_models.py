from flask_restx import fields

simple_post_fields = {
    'url': fields.String(required=True, description='The bookmarked URL'),
    'title': fields.String(required=True, description='The post title'),
    'notes': fields.String(description='Extended notes', default=''),
    'tags': fields.List(fields.String, description='List of tags'),
}

post_fields = dict(simple_post_fields, **{
    'date': fields.DateTime(dt_format='iso8601', description='Time the post was saved'),
    'others': fields.Integer(description='Number of other users with the same URL'),
    'shared': fields.Boolean(description='Whether the post is public', default=True),
    'hash': fields.String(description='Hash assigned by the service'),
})
