"""
API Namespaces - Organized endpoint groups
"""

from flask import Response, current_app
from flask_restx import Namespace, Resource

from filerelay.application.retrieval_service import RetrievalService
from filerelay.domain.errors import (
    ErrorCategory,
    RecordNotFoundError,
    StoreUnavailableError,
    UpstreamFetchError,
    ValidationError,
    create_error_response,
)


def text_error(category: ErrorCategory, status_code: int) -> Response:
    """Terminal plain-text error response."""
    body, status, headers = create_error_response(category, status_code)
    return Response(body, status=status, headers=headers)


# =============================================================================
# File Namespace - Streaming retrieval of registered files
# =============================================================================

file_ns = Namespace("file", description="File retrieval operations")


@file_ns.route("/<string:unique_id>")
@file_ns.param("unique_id", "Identifier returned when the file was registered")
class RelayedFile(Resource):
    """Relay a registered file from the origin provider"""

    @file_ns.doc("get_file")
    @file_ns.produces(["application/octet-stream"])
    @file_ns.response(200, "File content, status mirrors the origin")
    @file_ns.response(404, "File Not Found")
    @file_ns.response(500, "Server Error")
    @file_ns.response(502, "Upstream Fetch Failed")
    @file_ns.response(503, "Record Store Unavailable")
    def get(self, unique_id):
        """
        Stream a registered file

        Looks up the record, opens a streaming GET against the origin and
        relays the body as it arrives. The origin status code is passed
        through unchanged.
        """
        retrieval_service = current_app.container.resolve(RetrievalService)
        short_id = unique_id[:8]

        try:
            download = retrieval_service.open_download(unique_id)
        except (RecordNotFoundError, ValidationError):
            current_app.logger.info(f"[FILE_V1] No servable record for {short_id}")
            return text_error(ErrorCategory.FILE_NOT_FOUND, 404)
        except StoreUnavailableError as e:
            current_app.logger.error(f"[FILE_V1] Record store unavailable: {e}")
            return text_error(ErrorCategory.STORE_UNAVAILABLE, 503)
        except UpstreamFetchError as e:
            current_app.logger.error(f"[FILE_V1] Upstream fetch failed for {short_id}: {e}")
            return text_error(ErrorCategory.UPSTREAM_FAILED, 502)
        except Exception:
            current_app.logger.exception(f"[FILE_V1] Unexpected failure opening {short_id}")
            return text_error(ErrorCategory.SYSTEM_ERROR, 500)

        try:
            response = Response(
                download.iter_bytes(),
                status=download.status_code,
                headers=download.headers,
                direct_passthrough=True,
            )
        except Exception:
            # Stored names are sent literally and may not form a valid header
            current_app.logger.exception(f"[FILE_V1] Could not build response for {short_id}")
            download.close()
            return text_error(ErrorCategory.SYSTEM_ERROR, 500)

        # Runs when the WSGI server closes the body, including on disconnect
        response.call_on_close(download.close)

        current_app.logger.info(
            f"[FILE_V1] Relaying {short_id} with upstream status {download.status_code}"
        )
        return response
